from bcls.theme import Theme

# https://cloud.google.com/compute/docs/instances/instance-life-cycle
_TRANSITIONAL_STATUSES = {'PROVISIONING', 'STAGING', 'STOPPING', 'SUSPENDING', 'REPAIRING'}
_STOPPED_STATUSES = {'STOPPED', 'SUSPENDED', 'TERMINATED'}


def general_style(_):
    return ""


def name_style(_):
    return Theme.instance


def subtle_style(_):
    return Theme.subtle


def instance_status_style(instance):
    return status_style(instance.status)


def status_style(status):
    if status == 'RUNNING':
        return Theme.status_running
    if status in _TRANSITIONAL_STATUSES:
        return Theme.status_transitional
    if status in _STOPPED_STATUSES:
        return Theme.status_stopped
    return Theme.status_unknown
