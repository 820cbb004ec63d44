"""MCP tools for deploy_ssh."""

from deploy_ssh.tools.remote import ssh_download, ssh_run, ssh_upload

__all__ = ["ssh_download", "ssh_run", "ssh_upload"]
