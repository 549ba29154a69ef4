"""
Interface package: communication protocols for the Othello engine.

Modules:
    protocol - Line-based text protocol handler.
               Reads commands from stdin, writes replies to stdout.
               Installed as the `othello-engine` console script, or run
               directly: python -m interface.protocol
"""
