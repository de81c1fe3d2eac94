"""
REST API for the RBAC and attendance administration backend.
"""
