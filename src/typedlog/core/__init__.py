"""Core domain: levels, fields, ports, formatters and the logger."""
