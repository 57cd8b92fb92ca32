"""
Pokédex Catalog
Application Entry Point

This file serves as the entry point for the Flask application.
It uses the application factory pattern defined in the pokedex package.
"""

from pokedex import create_app
from pokedex.gateway import get_gateway

# Create the Flask application using the factory
app = create_app()

if __name__ == '__main__':
    try:
        app.run(host='0.0.0.0', port=app.config['PORT'])
    finally:
        get_gateway(app).close()
