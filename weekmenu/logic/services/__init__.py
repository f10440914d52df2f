"""Recipe and menu use cases.

Services combine the stores, the authorization gate, the menu rules and the
aggregator. Writes validate everything first and persist last, so a refused
operation leaves the stores untouched.
"""
