"""HR administration console.

Organized by feature modules (employees, leave, attendance, performance,
payroll). Each has frozen record types, pure query functions, a service
over the shared in-memory ``DomainStore`` and a thin Flask JSON controller.
"""
