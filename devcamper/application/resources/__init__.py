"""
Generic resource use cases.

One use case per CRUD verb, parameterized by the resource name and the
document store holding that resource.
"""
