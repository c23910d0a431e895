"""Adapters (infrastructure) for the bookstore.

Provide concrete input sources for the application, such as the JSON seed
loader used by the CLI.

Dependency rule: may import `bookstore.domain`; the domain must not import this
package.
"""
