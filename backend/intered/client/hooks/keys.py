"""Cache keys. A record key extends its collection key, so invalidating the
collection also reaches every record under it."""

STUDENTS = ("/api/students",)
UNIVERSITIES = ("/api/universities",)
PROGRAMS = ("/api/programs",)
AGENTS = ("/api/agents",)
APPLICATIONS = ("/api/applications",)
CARDS = ("/api/cards",)
EVENTS = ("/api/events",)
STUDENT_STAGE_COUNTS = ("/api/stats/students/stage-counts",)
APPLICATION_STAGE_COUNTS = ("/api/stats/applications/stage-counts",)


def student_key(student_id: int) -> tuple:
    return (*STUDENTS, student_id)


def university_key(university_id: int) -> tuple:
    return (*UNIVERSITIES, university_id)


def university_programs_key(university_id: int) -> tuple:
    return ("/api/programs/university", university_id)


def agent_key(agent_id: int) -> tuple:
    return (*AGENTS, agent_id)


def application_key(application_id: int) -> tuple:
    return (*APPLICATIONS, application_id)


def student_applications_key(student_id: int) -> tuple:
    return ("/api/applications/student", student_id)
