"""Configuration for deploy_ssh."""

from deploy_ssh.config.settings import Settings

__all__ = ["Settings"]
