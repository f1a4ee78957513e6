from django.utils.translation import gettext as _

from .conf import PROVIDER
from .eligibility import is_grid_eligible
from .validators import MIN_COLUMNS


def settings_summary_alter(summary, context, config=None):
    """Append the grid state to a formatter's settings summary.

    ``context`` carries the ``field_definition`` and the ``formatter`` whose
    third-party settings are described. Nothing is added unless the field is
    eligible and grid mode is switched on.
    """
    field_definition = context.get("field_definition")
    formatter = context.get("formatter")
    if field_definition is None or formatter is None:
        return
    if not is_grid_eligible(field_definition, config):
        return
    if not formatter.get_third_party_setting(PROVIDER, "grid_enable", False):
        return

    columns = formatter.get_third_party_setting(PROVIDER, "columns") or MIN_COLUMNS
    summary.append(_("Grid enabled"))
    summary.append(_("Columns: %(columns)s") % {"columns": columns})
