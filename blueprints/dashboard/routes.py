"""
Dashboard Routes - Admin content editor
Handles: Profile draft edits, social links, saving, project create/delete
"""

from flask import render_template, session, request, current_app, jsonify
from extensions import get_content_client, get_editors
from utils.decorators import editor_required
from .editor import AdminView
from . import dashboard_bp


def _payload():
    """Request values from a JSON body or a submitted form"""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form


@dashboard_bp.route('/')
def index():
    """Load a fresh editor for this browser session"""
    editor = AdminView(
        get_content_client(),
        status_clear_seconds=current_app.config.get('STATUS_CLEAR_SECONDS', 1.5),
        delete_status_clear_seconds=current_app.config.get('DELETE_STATUS_CLEAR_SECONDS', 1.2)
    ).mount()
    session['editor_id'] = get_editors().add(editor, replaces=session.get('editor_id'))
    current_app.logger.info(
        f"Admin editor loaded: {len(editor.draft.socials)} social links, {len(editor.projects)} projects")

    return render_template('admin.html', editor=editor, state=editor.to_dict())


@dashboard_bp.route('/state')
@editor_required
def state(editor):
    """Current editor state"""
    return jsonify(editor.to_dict())


@dashboard_bp.route('/profile/field', methods=['POST'])
@editor_required
def edit_field(editor):
    """Apply one keystroke-level edit to a profile text field"""
    data = _payload()
    try:
        editor.edit_field(data.get('field'), data.get('value', ''))
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    return jsonify(editor.to_dict())


@dashboard_bp.route('/socials', methods=['POST'])
@editor_required
def add_social(editor):
    """Append a blank social link"""
    editor.add_social()
    return jsonify(editor.to_dict())


@dashboard_bp.route('/socials/<int:index>', methods=['POST'])
@editor_required
def edit_social(editor, index):
    """Edit one field of one social link"""
    data = _payload()
    try:
        editor.edit_social(index, data.get('field'), data.get('value', ''))
    except (ValueError, IndexError) as e:
        return jsonify({'error': str(e)}), 400
    return jsonify(editor.to_dict())


@dashboard_bp.route('/save', methods=['POST'])
@editor_required
def save(editor):
    """Save the whole profile draft, taking the page's draft when sent along"""
    data = request.get_json(silent=True)
    draft = data.get('draft') if isinstance(data, dict) else None
    try:
        ok = editor.save(draft)
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    if not ok:
        current_app.logger.warning("Profile save failed")
    return jsonify({'ok': ok, 'status': editor.status.message})


@dashboard_bp.route('/projects', methods=['POST'])
@editor_required
def create_project(editor):
    """Create a project and reload the list"""
    ok = editor.create_project(_payload())
    if ok:
        current_app.logger.info("Project created")
    return jsonify({'ok': ok, 'status': editor.status.message, 'editor': editor.to_dict()})


@dashboard_bp.route('/projects/<project_id>/delete', methods=['POST'])
@editor_required
def delete_project(editor, project_id):
    """Delete a project"""
    ok = editor.delete_project(project_id)
    if ok:
        current_app.logger.info(f"Project {project_id} deleted")
    return jsonify({'ok': ok, 'status': editor.status.message})
