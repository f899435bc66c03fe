"""Log levels, samplers, and level-aware and syslog writers for log lines."""

__version__ = "0.1.0"
__all__ = ["level", "sampler", "writer", "syslog"]