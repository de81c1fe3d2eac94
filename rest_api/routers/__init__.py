"""
API routers: security (RBAC), attendance and admin.
"""
