"""Sample Compose stacks offered as starting points in the editor."""

from __future__ import annotations

from pydantic import BaseModel


class StackTemplate(BaseModel):
    """A named sample docker-compose.yml."""

    name: str
    content: str


NODE_POSTGRES = """services:
  app:
    build: .
    ports:
      - "3000:3000"
    environment:
      DATABASE_URL: postgresql://postgres:password@db:5432/mydb
      NODE_ENV: development
    depends_on:
      - db
    volumes:
      - .:/app
      - /app/node_modules

  db:
    image: postgres:16-alpine
    environment:
      POSTGRES_DB: mydb
      POSTGRES_PASSWORD: password
    ports:
      - "5432:5432"
    volumes:
      - pgdata:/var/lib/postgresql/data

volumes:
  pgdata:
"""

DJANGO_REDIS = """services:
  web:
    build: .
    command: python manage.py runserver 0.0.0.0:8000
    ports:
      - "8000:8000"
    environment:
      REDIS_URL: redis://redis:6379/0
      DATABASE_URL: postgresql://postgres:password@db:5432/django
    depends_on:
      - db
      - redis
    volumes:
      - .:/app

  db:
    image: postgres:16-alpine
    environment:
      POSTGRES_DB: django
      POSTGRES_PASSWORD: password
    volumes:
      - pgdata:/var/lib/postgresql/data

  redis:
    image: redis:7-alpine
    ports:
      - "6379:6379"

volumes:
  pgdata:
"""

WORDPRESS_MYSQL = """services:
  wordpress:
    image: wordpress:latest
    ports:
      - "8080:80"
    environment:
      WORDPRESS_DB_HOST: db
      WORDPRESS_DB_USER: wordpress
      WORDPRESS_DB_PASSWORD: secret
      WORDPRESS_DB_NAME: wordpress
    depends_on:
      - db
    volumes:
      - wp_data:/var/www/html

  db:
    image: mysql:8.0
    environment:
      MYSQL_DATABASE: wordpress
      MYSQL_USER: wordpress
      MYSQL_PASSWORD: secret
      MYSQL_ROOT_PASSWORD: rootsecret
    volumes:
      - db_data:/var/lib/mysql

volumes:
  wp_data:
  db_data:
"""

MERN = """services:
  frontend:
    build: ./frontend
    ports:
      - "3000:3000"
    depends_on:
      - api

  api:
    build: ./api
    ports:
      - "5000:5000"
    environment:
      MONGODB_URI: mongodb://mongo:27017/myapp
      NODE_ENV: development
    depends_on:
      - mongo

  mongo:
    image: mongo:7
    ports:
      - "27017:27017"
    volumes:
      - mongo_data:/data/db

volumes:
  mongo_data:
"""

STACK_TEMPLATES: dict[str, str] = {
    "Node.js + PostgreSQL": NODE_POSTGRES,
    "Python/Django + Redis": DJANGO_REDIS,
    "WordPress + MySQL": WORDPRESS_MYSQL,
    "MERN Stack": MERN,
}


def list_templates() -> list[StackTemplate]:
    """Return all templates in catalog order."""
    return [StackTemplate(name=name, content=content) for name, content in STACK_TEMPLATES.items()]


def get_template(name: str) -> StackTemplate | None:
    """Return a single template by name, or None."""
    content = STACK_TEMPLATES.get(name)
    if content is None:
        return None
    return StackTemplate(name=name, content=content)
