"""
OpenF1-based podium ingestion package.

Endpoints consumed (all read-only, https://api.openf1.org/v1):
  - /sessions   race sessions for a season
  - /meetings   race weekend names, locations, flags
  - /position   timestamped driver positions → final classification
  - /drivers    driver names, teams, colours, headshots
"""
