"""
File: Storage Routes

Handles:
    - Storage Policy Check (bucket exists, server can upload and delete)
"""

# Flask Packages
from flask_restx import Namespace, Resource

# Services
from ..storage.services.storage_check_service import StorageCheckService

# Session
from ..auth.services.session_service import SessionService

# Errors & Exceptions
from ..util.exceptions import AppException

# Namespaces
storage_namespace = Namespace('storage', description = 'Object Storage APIs')





@storage_namespace.route('/check')
class StorageCheck(Resource):

    def get(self):
        """
        Check that the document bucket exists and accepts uploads

        Response is {success, message, error?, details?, path?}.
        """

        try:
            SessionService.from_request().require_session()

        except AppException:
            return {
                "success": False,
                "error": "Not authenticated",
                "message": "You need to be signed in to check storage policies."
            }, 401

        return StorageCheckService().check()
