"""
security/ - Authentication and Access Control
==============================================
Account creation, log in, and the manager-only guard for menu handlers.
"""
