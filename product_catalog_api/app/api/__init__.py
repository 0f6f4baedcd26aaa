"""
API package containing the HTTP routes.

``router`` in ``router.py`` includes every domain router from
``endpoints``; ``responses`` turns service results into JSON
envelopes.
"""
