"""Realtime infrastructure (Socket.IO presence and event relay).

Chat, exercise notifications and presence all share one socket server owned
by the ``realtime`` app config.
"""
