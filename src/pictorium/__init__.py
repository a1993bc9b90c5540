"""pictorium -- schema lifecycle for a photo library database.

Registers the library's tables, creates and verifies them against a live
database, waits until each one is readable, and seeds the default rows.
Test processes get a one-shot reset-with-fixtures on top.

Packages
--------
core      errors, logging, settings, ORM base/session, database handle
entity    registry, models, provisioner, waiter, lifecycle, fixtures, gate
cli       ``pictorium db migrate | drop | reset | tables``
"""

__version__ = "0.3.0"
