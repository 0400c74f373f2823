"""
Use Cases

Organized by domain folder:
- auth/: Registration, login and password reset flows
"""
