"""
Job Tracker API package.
"""
