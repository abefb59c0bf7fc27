"""
Entities module: plain domain records.

  - Location: (lat, lon) with planar distance
  - Vehicle: the stranded vehicle
  - Helper / Capability: seeded service providers
  - AssistanceRequest / RequestType / RequestStatus
"""
