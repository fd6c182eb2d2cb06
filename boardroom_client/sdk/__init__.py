"""
SDK - Gateway client, session stores and the BoardroomClient composition root.

Import from the submodules (or from boardroom_client) directly; this
package does not re-export to keep the gateway importable by services.
"""
