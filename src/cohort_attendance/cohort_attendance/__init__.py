"""Cohort Attendance package.

Assigns members to age-banded cohorts, keeps a per-member daily presence
ledger, aggregates attendance statistics and detects members who have outgrown
their cohort. Organized by feature modules (cohorts, members, attendance,
statistics, transitions, auth) with Protocol repositories and MySQL adapters.
"""
