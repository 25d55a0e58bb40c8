"""
Notification Stream Request

Handles:
    - ?once=true  → send the current summary and close
"""

from flask import request





class StreamRequest:

    @staticmethod
    def apply(namespace):
        return namespace.param(
            'once',
            'Send the current summary and close the stream',
            _in = 'query',
            type = 'boolean',
            default = False
        )


    @staticmethod
    def get_data():
        return {
            "once": request.args.get("once", "false").lower() in ("1", "true", "yes")
        }
