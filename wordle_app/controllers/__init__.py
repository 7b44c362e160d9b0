"""
Controllers Package

Contains the HTTP blueprints of the game authority.
"""
