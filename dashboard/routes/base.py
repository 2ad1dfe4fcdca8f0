"""
Generic table/dialog view shared by every resource page
"""
import logging

from flask import render_template, request, flash, abort

from dashboard.core.crud import ResourcePage
from dashboard.forms import with_placeholder
from dashboard.utils.decorators import session_required
from dashboard.utils.helpers import get_api_client, report_error

logger = logging.getLogger(__name__)


class CrudView:
    """List, add, edit and delete one API resource on one page.

    Subclasses set the resource, its form and the lookup lists the table
    needs, and turn a record into table cells in row().

    Routes registered on the blueprint:
        GET  /                  table (?add=1, ?edit=<id>, ?delete=<id> open a dialog)
        POST /create            add dialog submit
        POST /<id>/edit         edit dialog submit
        POST /<id>/delete       delete dialog confirm / cancel
    """

    resource = None
    form_class = None
    lookups = {}
    title = ''
    description = ''
    columns = []
    # form field -> (lookup name, placeholder)
    select_fields = {}
    template = 'crud/index.html'

    def __init__(self, blueprint):
        self.blueprint = blueprint
        blueprint.add_url_rule('/', 'index', session_required(self.index))
        blueprint.add_url_rule('/create', 'create', session_required(self.create),
                               methods=['POST'])
        blueprint.add_url_rule('/<int:record_id>/edit', 'edit', session_required(self.edit),
                               methods=['POST'])
        blueprint.add_url_rule('/<int:record_id>/delete', 'delete', session_required(self.delete),
                               methods=['POST'])

    # ============= Hooks =============

    def row(self, record, page):
        """Table cells for one record"""
        raise NotImplementedError

    def choices(self, page):
        """Select options per form field, taken from the loaded lookups"""
        return {
            field: with_placeholder(page.lookups[lookup].choices(), placeholder)
            for field, (lookup, placeholder) in self.select_fields.items()
        }

    # ============= Helpers =============

    def load_page(self):
        page = ResourcePage(get_api_client(), self.resource, self.lookups)
        return page.load()

    def make_form(self, page, draft=None, formdata=None):
        if formdata is None:
            form = self.form_class(formdata=None, data=draft.values)
        else:
            form = self.form_class(formdata=formdata)
        for field, options in self.choices(page).items():
            form[field].choices = options
        return form

    def render(self, page, add_form=None, edit_form=None):
        return render_template(
            self.template,
            view=self,
            bp=self.blueprint.name,
            page=page,
            rows=[(record, self.row(record, page)) for record in page.records],
            add_form=add_form if add_form is not None else self.make_form(page, page.new_draft),
            edit_form=edit_form if edit_form is not None else self.make_form(page, page.edit_draft),
        )

    def _form_failed(self, page, action, form):
        details = '; '.join(
            f'{form[name].label.text}: {", ".join(errors)}'
            for name, errors in form.errors.items()
        )
        page.error = f'Failed to {action} {self.resource.name}: {details}'
        logger.warning(page.error)

    @property
    def name(self):
        return self.resource.name.capitalize()

    # ============= Views =============

    def index(self):
        """Table with at most one dialog open"""
        page = self.load_page()

        if request.args.get('add'):
            page.open_add()

        edit_id = request.args.get('edit', type=int)
        if edit_id is not None and not page.open_edit(edit_id):
            flash(f'{self.name} not found', 'warning')

        delete_id = request.args.get('delete', type=int)
        if delete_id is not None:
            if page.find(delete_id) is None:
                flash(f'{self.name} not found', 'warning')
            else:
                page.request_delete(delete_id)

        return self.render(page)

    def create(self):
        """Submit the add dialog"""
        page = self.load_page()
        page.open_add()
        form = self.make_form(page, formdata=request.form)

        if form.validate():
            page.new_draft.update(form.data)
            if page.add() is not None:
                flash(f'{self.name} added', 'success')
                return self.render(page)
        else:
            self._form_failed(page, 'add', form)

        report_error(page.error)
        return self.render(page, add_form=form)

    def edit(self, record_id):
        """Submit the edit dialog"""
        page = self.load_page()
        if not page.open_edit(record_id):
            abort(404)
        form = self.make_form(page, formdata=request.form)

        if form.validate():
            page.edit_draft.update(form.data)
            if page.edit() is not None:
                flash(f'{self.name} updated', 'success')
                return self.render(page)
        else:
            self._form_failed(page, 'edit', form)

        report_error(page.error)
        return self.render(page, edit_form=form)

    def delete(self, record_id):
        """Confirm or cancel the delete dialog"""
        page = self.load_page()
        page.request_delete(record_id)

        if request.form.get('action') == 'cancel':
            page.cancel_delete()
            return self.render(page)

        if page.confirm_delete():
            flash(f'{self.name} deleted', 'success')
        else:
            report_error(page.error)
        return self.render(page)
