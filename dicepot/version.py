"""
Version information for Dice Pot.
"""

VERSION = "0.3.0"


def get_version_info():
    """Get formatted version information"""
    return {
        'version': VERSION,
    }
