# Services package init
"""
Noteful Backend — Services Layer
=================================

What:  The persistence gateway sitting between routes (HTTP) and the database.

Service Inventory:
    - TableGateway: list_all / get_by_id / insert / update / delete_by_id
      for one ORM model
    - folder_gateway, note_gateway: the two instances the routes use
"""
