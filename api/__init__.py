"""API package - HTTP routes, middleware and response helpers"""
