"""
Upload Fund Document Request Definition
Handles:
    - document_type (form-data)
    - file (Document upload)
"""

# Python Packages
from flask import request as flask_request





class UploadDocumentRequest:

    @staticmethod
    def apply(namespace):
        """
        Apply swagger decorators to endpoint
        """

        def decorator(func):
            func = namespace.doc(consumes = ['multipart/form-data'])(func)
            func = namespace.param(
                'document_type',
                'pitch_deck / ppm / term_sheet / track_record / other',
                _in = 'formData',
                required = False
            )(func)

            func = namespace.param(
                'file',
                'Document',
                type = 'file',
                _in = 'formData',
                required = True
            )(func)

            return func

        return decorator


    @staticmethod
    def get_data():
        """
        Extract request data
        """

        return {
            "document_type": flask_request.form.get("document_type"),
            "file": flask_request.files.get("file")
        }
