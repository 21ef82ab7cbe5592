"""Firestore collection names (schema-in-code).

Firestore has no DDL or migrations. Collections are created automatically
when the first document is written; these constants keep the names in one
place.
"""

# Site content
COLLECTION_HERO_SLIDES = "heroSlides"
COLLECTION_TESTIMONIALS = "testimonials"
COLLECTION_ABOUT_CONTENT = "aboutContent"
COLLECTION_PROCESS_STEPS = "processSteps"
COLLECTION_WEDDINGS = "weddings"
# Holds both the slot images and the single "content" document
COLLECTION_HERO_EXTENSION = "heroExtension"

# Enquiries
COLLECTION_HOTEL_ENQUIRIES = "hotelEnquiries"
COLLECTION_VENDOR_ENQUIRIES = "vendorEnquiries"
COLLECTION_BANQUET_ENQUIRIES = "banquetEnquiries"

# Accounts
COLLECTION_AUTH = "auth"
COLLECTION_ADMINS = "admins"
COLLECTION_HOTELS = "hotels"
COLLECTION_VENDORS = "vendors"
COLLECTION_BANQUETS = "banquets"
COLLECTION_USERS = "users"
COLLECTION_BLOG = "blog"
COLLECTION_MARKETING = "marketing"
