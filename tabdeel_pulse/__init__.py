"""Tabdeel Pulse.

Backend for the Tabdeel Pulse operations dashboard. The dashboard is a
single-page application; this package is the REST/JSON API it talks to.

Core subpackages
----------------

- ``tabdeel_pulse.core``:

  - Logging and monitoring setup.
  - Permission identifiers, default roles and financial limits.
  - Password hashing and small display-formatting helpers.
  - The database layer (SQLModel entities, async repositories, seed data)
    and the camelCase I/O models used on the wire.

- ``tabdeel_pulse.server``:

  - The FastAPI application, its configuration and the ``/api`` routers
    for finance, service jobs, messaging, tasks, announcements, users,
    roles, projects and account heads.

Every subsystem is plain CRUD over HTTP. The only state transitions are the
payment instruction decision (``Pending`` to ``Approved`` or ``Rejected``) and
account head approval (``Pending Approval`` to ``Active``).
"""
