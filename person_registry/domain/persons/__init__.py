"""
Persons bounded context — domain layer.

- Person entity
- Repository outcome values (results and error markers)
- Repository port
"""
