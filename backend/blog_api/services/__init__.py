# Services package init
"""
Blog API Backend: Services Layer
===================================

What:  Logic sitting between routes (HTTP) and the document store.

Service Inventory:
    - BlogService: create / list / delete blog posts against the store
    - DemoService: fetches the third-party demo API for the home page and logs it
"""
