"""
Bookings App - Customer bookings against plots

A customer booking links a buyer to exactly one plot, carries the
commercial terms of the sale and a list of installment payments, and
drives the plot's status through its lifecycle:

    available -> reserved -> booked -> registered (terminal)

Architecture:
- Models: Customer, Installment
- Services: status_transitions (lifecycle rules), booking_management
  (transactional create/update/delete)
- Views: CustomerViewSet
"""
