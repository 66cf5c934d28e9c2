"""
Admin dashboard logic shared by the admin routers.
"""
