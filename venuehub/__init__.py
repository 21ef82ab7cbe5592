"""venuehub: content and enquiry API for a wedding-venue marketplace."""
