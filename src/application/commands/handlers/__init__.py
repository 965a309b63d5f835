"""Command handlers.

Each handler receives its collaborators as protocols in ``__init__`` and
exposes ``async def handle(cmd) -> Result[..., ApplicationError]``.
"""
