"""
Per-domain repository modules for database access.

Public functions open their own unit of work via
``coursetrack.db.database.transaction``; the statement-level helpers
(``get_course(..., lock=...)``, ``delete_course``, ``add_assignment``,
``delete_assignments_for_course``) run inside a caller's transaction and are
sequenced by ``coursetrack.services.integrity_service``.
"""
