"""Routing: typed URL-to-deeplink matching.

Routes are declared in order and scanned linearly; the first route
whose segments all match the URL tokens wins.
"""
