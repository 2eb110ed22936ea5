from .config import AppConfig, CommandsConfig, LoggerConfig, LoggerLevel

__all__ = ["AppConfig", "CommandsConfig", "LoggerConfig", "LoggerLevel"]
