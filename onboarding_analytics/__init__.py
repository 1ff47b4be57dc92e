"""
Onboarding Analytics

Typed onboarding analytics events and the service that forwards them.
"""
