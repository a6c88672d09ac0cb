"""
core
----

View state of the nurses page, kept free of any rendering code:

- calculate_age / max_birth_date:
  Whole-year age from a date of birth and the bound for the date input.

- SortState, PageState, TransientNotifier:
  Sort order, current page slice and the single status message, each with
  plain transition functions.

- FormController:
  Add/edit dialog with the minimum-age guard.

- NurseManager:
  Ties the pieces to the backend client; fetch, add, edit, delete and export.
"""
