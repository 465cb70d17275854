"""Routing — route templates, matching, and value extraction.

Routes are defined once at startup and handed to a ``RouteMatcher``,
which evaluates all of them against each incoming URL.
"""
