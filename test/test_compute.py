import pytest

from bcls.compute import Compute, Gcloud, Instance
from bcls.err import ListFailed
from bcls_test_util import instance_json


def test_list_instances(gcloud):
    gcloud.returns(instance_json('store-lb-1'), instance_json('auth-svc-1'), instance_json('store-lb-2'))

    instances = Compute('test-project').list_instances()

    assert [i.name for i in instances] == ['store-lb-1', 'auth-svc-1', 'store-lb-2']
    assert all(i.project == 'test-project' for i in instances)
    assert gcloud.last_command == ['gcloud', 'compute', 'instances', 'list', '--project=test-project',
                                   '--format=json']


def test_custom_executable_and_zones(gcloud):
    Compute('test-project', Gcloud('/opt/sdk/bin/gcloud')).list_instances(zones=['europe-west1-b', 'us-east1-c'])

    assert gcloud.last_command[0] == '/opt/sdk/bin/gcloud'
    assert gcloud.last_command[-1] == '--zones=europe-west1-b,us-east1-c'


def test_no_instances(gcloud):
    gcloud.stdout = ''
    assert Compute('test-project').list_instances() == []


def test_failure_keeps_diagnostic_verbatim(gcloud):
    diagnostic = "ERROR: (gcloud.compute.instances.list) Some requests did not succeed:\n - Required 'compute.instances.list' permission\n"
    gcloud.fails(diagnostic)

    with pytest.raises(ListFailed) as e:
        Compute('test-project').list_instances()

    assert e.value.project == 'test-project'
    assert e.value.diagnostic == diagnostic
    assert diagnostic in str(e.value)


def test_failure_without_stderr(gcloud):
    gcloud.fails('', returncode=2, stdout='something went wrong')

    with pytest.raises(ListFailed) as e:
        Compute('test-project').list_instances()

    assert e.value.diagnostic == 'something went wrong'


def test_gcloud_not_installed(gcloud):
    gcloud.raises(FileNotFoundError(2, 'No such file or directory', 'gcloud'))

    with pytest.raises(ListFailed) as e:
        Compute('test-project').list_instances()

    assert 'gcloud' in e.value.diagnostic


@pytest.mark.parametrize('output', ['not json', '{"name": "store-lb-1"}', '[{"status": "RUNNING"}]', '["store-lb-1"]'])
def test_malformed_output(gcloud, output):
    gcloud.stdout = output

    with pytest.raises(ListFailed):
        Compute('test-project').list_instances()


def test_instance_from_json():
    data = instance_json('store-lb-1', zone='europe-west1-b', ip='10.1.2.3', machine_type='n2-standard-4',
                         status='TERMINATED', labels={'team': 'store', 'cell': 'c1'})

    instance = Instance.from_json('test-project', data)

    assert instance.name == 'store-lb-1'
    assert instance.project == 'test-project'
    assert instance.zone == 'europe-west1-b'
    assert instance.ip == '10.1.2.3'
    assert instance.machine_type == 'n2-standard-4'
    assert instance.cpu_platform == 'Intel Broadwell'
    assert instance.status == 'TERMINATED'
    assert instance.labels == {'team': 'store', 'cell': 'c1'}
    assert instance.labels_str() == 'team: store, cell: c1'


def test_instance_with_only_name():
    instance = Instance.from_json('test-project', {'name': 'bare'})

    assert instance == Instance('bare', 'test-project')
    assert instance.labels_str() == ''


def test_gcloud_not_executable(gcloud):
    gcloud.raises(PermissionError(13, 'Permission denied', '/opt/sdk/gcloud'))

    with pytest.raises(ListFailed) as e:
        Compute('test-project', Gcloud('/opt/sdk/gcloud')).list_instances()

    assert '/opt/sdk/gcloud' in e.value.diagnostic
    assert 'Permission denied' in e.value.diagnostic


def test_output_not_utf8(gcloud):
    gcloud.stdout = b'[{"name": "store-\xff"}]'

    with pytest.raises(ListFailed) as e:
        Compute('test-project').list_instances()

    assert 'UTF-8' in e.value.diagnostic


def test_failure_diagnostic_not_utf8(gcloud):
    gcloud.fails(b'ERROR: bad byte \xff')

    with pytest.raises(ListFailed) as e:
        Compute('test-project').list_instances()

    assert e.value.diagnostic.startswith('ERROR: bad byte ')


def test_null_fields_are_empty():
    data = {'name': 'store-lb-1', 'cpuPlatform': None, 'status': None, 'networkInterfaces': [{'networkIP': None}],
            'zone': None, 'machineType': None, 'labels': None}

    instance = Instance.from_json('test-project', data)

    assert instance == Instance('store-lb-1', 'test-project')
