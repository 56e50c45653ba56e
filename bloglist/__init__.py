"""Bloglist API: blogs owned by users, with token auth and blog statistics."""
