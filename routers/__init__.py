"""
M-Pulse API Routers
"""
