"""Kida environment binding.

Registers a ``Client``'s entry points as template globals::

    env = Environment(loader=FileSystemLoader("templates"))
    register_globals(env, client)
"""

from kida import Environment

from perch.client import Client


def register_globals(env: Environment, client: Client) -> Environment:
    """Add the client's entry points to *env* and return it."""
    for name, value in client.template_globals().items():
        env.add_global(name, value)
    return env
