#!/usr/bin/env python3
"""
Exercise the CRUD endpoints of a running server, one call after another.

Start the server first (``python -m users_api``), then:

    python smoke_crud.py

Set USERS_API_BASE_URL to point at a server other than localhost:3000.
"""

import os
import sys

import httpx

BASE_URL = os.getenv("USERS_API_BASE_URL", "http://localhost:3000")

CREATED = {"name": "John Doe", "email": "john@example.com", "address": "123 Main St"}
UPDATED = {"name": "Harris", "email": "harris@fake.com", "address": "leof. alexandras 120"}


class SmokeFailure(Exception):
    pass


def expect(label: str, resp: httpx.Response, status_code: int) -> dict:
    body = resp.json()
    print(f"{label} Response: {body}")
    if resp.status_code != status_code:
        raise SmokeFailure(f"{label}: expected {status_code}, got {resp.status_code}")
    return body


def check_crud_operations(client: httpx.Client) -> None:
    created = expect("Create User", client.post("/users", json=CREATED), 200)
    user_id = created["id"]
    if not isinstance(user_id, int) or {k: created[k] for k in CREATED} != CREATED:
        raise SmokeFailure(f"Create User: unexpected body {created}")

    listed = expect("Get All Users", client.get("/users"), 200)
    if user_id not in [u["id"] for u in listed["users"]]:
        raise SmokeFailure(f"Get All Users: user {user_id} missing")

    fetched = expect("Get User by ID", client.get(f"/users/{user_id}"), 200)
    if fetched["user"] != {"id": user_id, **CREATED}:
        raise SmokeFailure(f"Get User by ID: unexpected body {fetched}")

    expect("Update User", client.put(f"/users/{user_id}", json=UPDATED), 200)

    fetched = expect("Get Updated User", client.get(f"/users/{user_id}"), 200)
    if fetched["user"] != {"id": user_id, **UPDATED}:
        raise SmokeFailure(f"Get Updated User: unexpected body {fetched}")

    expect("Delete User", client.delete(f"/users/{user_id}"), 200)
    expect("Get Deleted User", client.get(f"/users/{user_id}"), 404)


if __name__ == "__main__":
    try:
        with httpx.Client(base_url=BASE_URL, timeout=10) as client:
            check_crud_operations(client)
    except (SmokeFailure, httpx.HTTPError) as e:
        print(f"✗ Error: {e}")
        sys.exit(1)

    print("✓ All CRUD operations behaved as expected")
    sys.exit(0)
