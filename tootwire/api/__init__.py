"""
Mastodon REST API endpoints.
"""
