#!/usr/bin/env python3
"""
Quick example demonstrating home-facade basic usage.

Run with: PYTHONPATH=src python3 example.py
"""

from home_facade import HomeClient, HomeFacade, NotificationSink, console_handler

print("=" * 60)
print("home-facade Example")
print("=" * 60)

# 1. Notification sink
print("\n1. Creating notification sink...")
sink = NotificationSink()
sink.subscribe(console_handler())
print("   ✓ Sink created, console handler subscribed")

# 2. Facade with the default devices
print("\n2. Creating facade...")
facade = HomeFacade(sink=sink)
print(f"   ✓ Devices: {[d.id for d in facade.devices]}")

# 3. Client
client = HomeClient(facade)

# 4. Bulk operations
print("\n3. Turning everything on...")
result = client.activate_all()
print(f"   ✓ {result.summary()}")

print("\n4. Turning everything off...")
result = client.deactivate_all()
print(f"   ✓ {result.summary()}")

# 5. History
print("\n5. Recorded notifications:")
for notification in sink.history:
    print(f"   {notification.timestamp.isoformat()} {notification.device_id}: {notification.state}")

print("\n" + "=" * 60)
print("Example complete!")
print("=" * 60)
