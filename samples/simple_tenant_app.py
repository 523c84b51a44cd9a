# Copyright (c) 2020 Software AG,
# Darmstadt, Germany and/or Software AG USA Inc., Reston, VA, USA,
# and/or its subsidiaries and/or its affiliates and/or their licensors.
# Use, reproduction, transfer, publication or disclosure is prohibited except
# as specifically provided for in your License Agreement with Software AG.

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from dotenv import load_dotenv

from cloudthing_api.app import SimpleCloudThingApp
from cloudthing_api.model import DataPoint, Device, Pagination

# A simple CloudThing application can be created just like this.
# The authentication information is read from the standard CloudThing
# environment variables (CT_BASEURL, CT_USER, CT_PASSWORD or CT_TOKEN).

load_dotenv()  # load environment from a .env if present
ct = SimpleCloudThingApp()
print("CloudThingApp initialized.")
print(f"{ct.base_url}, Tenant: {ct.tenant_id}")

# The SimpleCloudThingApp behaves just like any other CloudThingApi instance,
# e.g. ...

# Reading the tenant
tenant = ct.tenant.get()
print(f"\nTenant: {tenant.name} ({tenant.short_name})")

# Reading applications with their directory expanded
print("\nApplications:")
applications, _ = ct.applications.list(expand='directory')
for a in applications:
    directory = a.directory.name if a.directory else '-'
    print(f"  {a.name} #{a.get_id()}, directory: {directory}")

# Reading products and their first devices
print("\nProducts:")
products, _ = ct.products.list(expand={'devices': Pagination(limit=5)})
for p in products:
    print(f"  {p.name} #{p.get_id()}")
    for d in p.devices or []:
        print(f"    device #{d.get_id()}, activated: {d.activated}")

if products:
    # Creating a device and writing some data
    device = ct.devices.create_by_product(products[0].get_id(), Device(custom={'source': 'sample'}))
    print(f"\nCreated new device: #{device.get_id()}")

    now = datetime.now(timezone.utc)
    points = [DataPoint(time=now - timedelta(minutes=i), value=20 + i, key='temp') for i in range(5)]
    ct.resources.write_data(device, points)

    data, list_params = ct.resources.get_data(device, 'temp', start=now - timedelta(hours=1), end=now)
    print(f"Read {len(data)} of {list_params.size} data points.")

    # Cleaning up
    device.delete()
    print('Device removed.')

ct.revoke_token()
print('\nToken revoked.')
