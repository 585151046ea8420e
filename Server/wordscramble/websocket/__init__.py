"""
WebSocket Package

Socket.IO event handlers exposing the game service.
"""
