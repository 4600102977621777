"""Small HTTP server with HTML pages, JSON endpoints and middleware."""