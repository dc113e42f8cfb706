"""
Services layer - Business logic goes here.
Keep services focused on specific domains (alerts, city pulse, map, feed).

DESIGN PRINCIPLE:
- Services contain business logic, NOT routes
- Confidence and city status are pure functions over alert snapshots
- All alert mutation goes through the alert store
"""
