"""
Weekly course timetable: policy-checked admission of courses into
per-profile schedules (undergraduate / graduate).
"""
