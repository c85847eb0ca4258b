"""
List Adapters Module
====================

A list adapter is the bridge between Metro Reviews webhooks and a bot list's
own storage and moderation workflow.

DESIGN PRINCIPLE:
-----------------
Integrase never touches list data itself. It:
1. Receives the webhook from the directory
2. Checks the shared secret and decodes the payload
3. Calls the matching adapter method
4. Maps the outcome to a plain-text HTTP response

Available Adapters:
- memory: in-process reference adapter (see adapters/memory/)
"""
