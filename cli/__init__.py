"""
formstate CLI - demo forms for the form state manager

Commands:
- formstate person - Drive the person form with change events
- formstate load - Run the delayed data loader
- formstate version - Show version information
"""

__version__ = "0.1.0"
