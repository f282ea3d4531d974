"""
Brands app.

Tenants of the license service and the products each of them sells.
Product entities and ports live here; the product table is owned by
the products app.
"""
