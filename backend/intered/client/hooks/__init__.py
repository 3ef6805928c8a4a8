from .agents import AgentMutations, FeaturedToggle, use_agent, use_agent_mutations, use_agents
from .applications import (
    ApplicationMutations,
    use_application,
    use_application_mutations,
    use_applications,
    use_student_applications,
)
from .base import UpdateVariables, to_payload
from .cards import issue_card_mutation, use_cards
from .events import schedule_event_mutation, use_events
from .stats import use_application_stage_counts, use_student_stage_counts
from .students import (
    ImportFile,
    PriorityToggle,
    StudentMutations,
    use_filtered_students,
    use_student,
    use_student_mutations,
    use_students,
)
from .universities import (
    UniversityMutations,
    use_programs,
    use_universities,
    use_university,
    use_university_mutations,
    use_university_programs,
)

__all__ = [
    "AgentMutations",
    "ApplicationMutations",
    "FeaturedToggle",
    "ImportFile",
    "PriorityToggle",
    "StudentMutations",
    "UniversityMutations",
    "UpdateVariables",
    "issue_card_mutation",
    "schedule_event_mutation",
    "to_payload",
    "use_agent",
    "use_agent_mutations",
    "use_agents",
    "use_application",
    "use_application_mutations",
    "use_application_stage_counts",
    "use_applications",
    "use_cards",
    "use_events",
    "use_filtered_students",
    "use_programs",
    "use_student",
    "use_student_applications",
    "use_student_mutations",
    "use_student_stage_counts",
    "use_students",
    "use_universities",
    "use_university",
    "use_university_mutations",
    "use_university_programs",
]
