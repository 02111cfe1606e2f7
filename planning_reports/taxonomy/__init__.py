"""
Closed vocabularies shared by the classifier, models, and renderers.

  profiles        — goal status and scenario profile enums from the projection engine.
  bucket_taxonomy — the six feasibility buckets, their labels, titles, and order.

Neither module imports from any other ``planning_reports`` package except
``planning_reports.errors``.
"""
