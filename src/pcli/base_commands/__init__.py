"""
Built-in command units.

Every module in this directory is loaded as a command unit before the
configured command directories, so user commands may take over its keywords.
"""
