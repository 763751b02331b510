"""
Command-line entrypoint: option parsing, command resolution and dispatch.
"""
