"""Example: using the services directly (no presentation layer).

Goal: show that every operation takes the acting cohort explicitly.
"""

from datetime import date

from src.cohort_attendance.cohort_attendance.main import bootstrap


def main():
    container = bootstrap()
    today = date.today()

    report = container.statistics_service.cohort_report("zona-r21", today=today)
    print(report.today)
    print(report.month)

    for candidate in container.transition_service.candidates_for("zona-r21", today=today):
        print(candidate.member.full_name, candidate.age, "->", candidate.suggested_cohort_id)


if __name__ == "__main__":
    main()
