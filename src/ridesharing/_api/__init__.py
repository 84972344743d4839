"""Endpoint modules. Each builds on the :class:`~ridesharing._transport.Transport` protocol."""
