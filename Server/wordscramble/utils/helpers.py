"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Dict
from flask import request


def get_user_identity(request_obj=None) -> Dict[str, str]:
    """Client address of ``request_obj`` (the current request by default)."""
    if request_obj is None:
        request_obj = request
    return {'user_ip': getattr(request_obj, 'remote_addr', None) or 'unknown'}
