"""NodeKit CLI commands"""
