from intered.client.components import university_row
from intered.client.filters import filter_universities, search
from intered.client.hooks.keys import UNIVERSITIES
from intered.client.hooks.universities import UniversityMutations, universities_query

from .base import Page


class UniversityManagementPage(Page):
    title = "University Management"

    def __init__(self, ctx):
        super().__init__(ctx)
        self.selected_filter = "all"
        self.search_text = ""
        self.mutations = UniversityMutations(ctx)

    def queries(self):
        return [universities_query(self.ctx)]

    @property
    def universities(self) -> list:
        universities = filter_universities(self.data(UNIVERSITIES, []), self.selected_filter)
        return search(universities, self.search_text, ("name", "country", "city"))

    @property
    def rows(self):
        return [university_row(u) for u in self.universities]
