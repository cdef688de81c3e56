"""
Classic Pong: two paddles, one ball, endless match.
"""
