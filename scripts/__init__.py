"""Maintenance scripts (database initialization and seeding)"""
