# Routes package init
"""
Blog API Backend: Routes Package
===================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - blogs.py:   POST   /blogs         (create a post)
                  GET    /blogs         (list every post)
                  DELETE /blogs/{id}    (delete one post)
    - health.py:  GET    /health        (service + store status)
    - shell.py:   GET    /              (header and greeting cards)
                  GET    /home          (home page; logs a demo API fetch)

Routes stay thin: pull data out of the request, call a service, return the
result. Errors propagate to the global handlers in main.py.
"""
