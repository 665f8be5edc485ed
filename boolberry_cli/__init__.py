"""
Sample command-line programs built on the Boolberry SDK.
"""
