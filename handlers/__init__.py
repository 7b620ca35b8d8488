"""
handlers/ - Presentation Layer
================================
Console menu handlers. Each handler reads input through a Console,
delegates to the appropriate Service, and prints the outcome.
No business logic or SQL lives here.
"""
