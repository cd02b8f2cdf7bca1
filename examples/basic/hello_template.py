"""Split a template into markup and code in 3 lines."""

from tessera import scan

pieces = scan("<h1>{{ title }}</h1>\n<p>{{ paste('Hello', name) }}</p>")
print(pieces)
