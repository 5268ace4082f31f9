"""Core components for fluentcheck.

This package contains the validation session that registers and evaluates
checks, the error type raised when a session fails, and the configuration
manager used by the command-line interface.
"""
