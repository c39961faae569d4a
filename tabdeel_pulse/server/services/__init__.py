"""Dependencies and logic shared by several API routers."""
