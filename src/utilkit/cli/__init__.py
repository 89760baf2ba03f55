from .app import app, app_state
from . import commands  # noqa: F401  # registers the commands on app

__all__ = ['app', 'app_state', 'main']


def main():
    app()
