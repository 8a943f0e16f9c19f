"""
Use Cases

Organized by domain folder:
- auth/: Registration, verification, login and password reset flows
- users/: Profile and account management
"""
