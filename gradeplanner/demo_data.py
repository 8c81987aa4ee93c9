def _assessment(unit_id, idx, name, weight, score=None, type_='exam', due_at=None, max_score=None):
    return {
        'id': unit_id * 100 + idx,
        'unit_id': unit_id,
        'name': name,
        'type': type_,
        'due_at': due_at,
        'weight': weight,
        'obtained_score': score,
        'max_score': max_score
    }
def get_demo_units():
    """
    Generator that yields sample units as the assessment and configuration
    providers would hand them over, one for each unit status.
    """
    u1 = 1
    yield {
        "id": u1,
        "name": "Applied Mathematics",
        "grading": {'grade_scale': '0-20', 'minimum_passing_grade': 10, 'has_retake_exam': False},
        "assessments": [
            _assessment(u1, 1, 'Midterm', 40, 14.0, due_at='2025-11-10T09:00:00Z', max_score=20),
            _assessment(u1, 2, 'Final exam', 60, 12.0, type_='final_exam', due_at='2026-01-20T09:00:00Z', max_score=20)
        ],
        "expected_status": "passed"
    }
    u2 = 2
    yield {
        "id": u2,
        "name": "Physics I",
        "grading": {'grade_scale': '0-20', 'minimum_passing_grade': 10, 'has_retake_exam': False},
        "assessments": [
            _assessment(u2, 1, 'Lab reports', 40, 6.0, type_='assignment'),
            _assessment(u2, 2, 'Exam', 60, 5.0)
        ],
        "expected_status": "failed"
    }
    u3 = 3
    yield {
        "id": u3,
        "name": "Programming",
        "grading": {'grade_scale': '0-20', 'minimum_passing_grade': 10, 'has_retake_exam': False},
        "assessments": [
            _assessment(u3, 1, 'Project', 50, 12.0, type_='project'),
            _assessment(u3, 2, 'Exam', 50)
        ],
        "expected_status": "on_track"
    }
    u4 = 4
    yield {
        "id": u4,
        "name": "Organic Chemistry",
        "grading": {'grade_scale': '0-20', 'minimum_passing_grade': 10, 'has_retake_exam': False},
        "assessments": [
            _assessment(u4, 1, 'Quiz series', 50, 5.0, type_='quiz'),
            _assessment(u4, 2, 'Exam', 50)
        ],
        "expected_status": "at_risk"
    }
    u5 = 5
    yield {
        "id": u5,
        "name": "Statistics",
        "grading": {'grade_scale': '0-20', 'minimum_passing_grade': 10, 'has_retake_exam': False},
        "assessments": [
            _assessment(u5, 1, 'Exam', 80, 2.0),
            _assessment(u5, 2, 'Participation', 20, type_='participation')
        ],
        "expected_status": "unreachable"
    }
    u6 = 6
    yield {
        "id": u6,
        "name": "Databases",
        "grading": {'grade_scale': '0-20', 'minimum_passing_grade': 10, 'has_retake_exam': True},
        "assessments": [
            _assessment(u6, 1, 'Exam', 80, 2.0),
            _assessment(u6, 2, 'Assignment', 20, type_='assignment')
        ],
        "expected_status": "needs_retake"
    }
    u7 = 7
    yield {
        "id": u7,
        "name": "Portuguese Language",
        "grading": {'grade_scale': '0-10', 'minimum_passing_grade': 5, 'has_retake_exam': False},
        "assessments": [
            _assessment(u7, 1, 'Essay', 30, 8.0, type_='assignment'),
            _assessment(u7, 2, 'Oral presentation', 30, 7.0, type_='participation'),
            _assessment(u7, 3, 'Exam', 40)
        ],
        "expected_status": "on_track"
    }
