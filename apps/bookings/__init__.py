"""Hotel bookings.

A booking is stored as an order of type ``hotel`` with a single hotel
order item; this app only provides the booking-specific API and rules.
"""
