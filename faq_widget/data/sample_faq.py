from faq_widget.content.schemas import QueryPayload, WelcomePayload

# ==============================================================================
# TOPIC DEFINITIONS
# ==============================================================================

# --- TOPIC: ABOUT US ---
about_us = QueryPayload(
    message=(
        "We export premium Highland produce to partners in more than "
        "twenty countries, working directly with local growers."
    ),
    sub={
        "Mission": "Quality first. Every shipment is graded before it leaves the farm.",
        "History": "Founded in 2009 as a growers' cooperative, exporting since 2012.",
        "Team": "A team of forty across sourcing, logistics and customer care.",
    },
)

# --- TOPIC: PRODUCTS ---
products = QueryPayload(
    message="We supply fresh and dried produce, packed to order.",
    sub={
        "Tea": "Orthodox and CTC black tea, green tea and specialty blends.",
        "Spices": "Cardamom, cinnamon, black pepper and cloves, whole or ground.",
        "Coffee": "Washed Arabica, green or roasted to your profile.",
    },
)

# --- TOPIC: ORDERING ---
ordering = QueryPayload(
    message="Orders are placed through your account manager or our trade portal.",
    sub={
        "Minimum order": "The minimum order is one pallet per product line.",
        "Lead time": "Allow three to five weeks from confirmation to dispatch.",
    },
)

# --- TOPIC: SHIPPING ---
shipping = QueryPayload(
    message=(
        "We ship by sea and air freight under FOB or CIF terms. "
        "Tracking details are sent as soon as a container is booked."
    ),
)

# --- TOPIC: CONTACT ---
contact = QueryPayload(
    message="Write to trade@highland.example or call +1 555 0100, Monday to Friday.",
)


# ==============================================================================
# REGISTRY
# ==============================================================================

SAMPLE_QUERIES = {
    "About Us": about_us,
    "Products": products,
    "Ordering": ordering,
    "Shipping": shipping,
    "Contact": contact,
}

SAMPLE_WELCOME = WelcomePayload(
    message="Hi! I'm the Highland FAQ Bot. What would you like to know?",
    queries=list(SAMPLE_QUERIES),
)
