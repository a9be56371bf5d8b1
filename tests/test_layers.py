import numpy as np
import pytest

from neuralnet import (Activation_Linear, Layer_FullyConnected, Layer_Input,
                       ShapeMismatchError, TopologyError)


def test_input_layer_appends_bias():
    layer = Layer_Input(2)
    assert layer.output([0.3, -0.7]).tolist() == [0.3, -0.7, 1.0]
    assert layer.output_width == 3


def test_input_layer_without_bias_passes_values_through():
    layer = Layer_Input(2, provides_bias=False)
    assert layer.output([0.3, -0.7]).tolist() == [0.3, -0.7]


@pytest.mark.parametrize('inputs', [[1.0], [1.0, 2.0, 3.0], [[1.0, 2.0]]])
def test_input_layer_rejects_wrong_length(inputs):
    with pytest.raises(ShapeMismatchError):
        Layer_Input(2).output(inputs)


def test_input_layer_has_no_activation():
    with pytest.raises(AttributeError):
        Layer_Input(2).activation


@pytest.mark.parametrize('n_neurons', [0, -1, 2.5, True])
def test_invalid_neuron_counts_are_rejected(n_neurons):
    with pytest.raises(TopologyError):
        Layer_Input(n_neurons)
    with pytest.raises(TopologyError):
        Layer_FullyConnected(n_neurons, Layer_Input(2))


def test_default_weights_are_zero_and_sized_with_bias():
    layer = Layer_FullyConnected(4, Layer_Input(2))
    assert layer.n_inputs == 3
    assert layer.weights.shape == (12,)
    assert not layer.weights.any()


def test_zero_weights_give_half_everywhere():
    layer = Layer_FullyConnected(3, Layer_Input(2), provides_bias=False)
    assert layer.output([5.0, -2.0, 1.0]).tolist() == [0.5, 0.5, 0.5]


def test_weights_are_interleaved_by_destination_neuron():
    # identity activation so the raw dot products come out
    layer = Layer_FullyConnected(2, Layer_Input(2), weights=[1, 10, 2, 20, 3, 30],
                                 provides_bias=False, activation=Activation_Linear)
    # neuron 0 uses weights[0::2] = [1, 2, 3], neuron 1 uses [10, 20, 30]
    output = layer.output([1.0, 1.0, 1.0])
    assert output.tolist() == [6.0, 60.0]
    output = layer.output([0.0, 0.0, 1.0])
    assert output.tolist() == [3.0, 30.0]


def test_fully_connected_bias_is_always_last(spiral_inputs):
    layer = Layer_FullyConnected(3, Layer_Input(2), weights=np.arange(9) - 4.0)
    for row in spiral_inputs:
        output = layer.output(np.append(row, 1.0))
        assert output.shape == (4,)
        assert output[-1] == 1.0


def test_fully_connected_rejects_wrong_input_length():
    layer = Layer_FullyConnected(2, Layer_Input(2))
    with pytest.raises(ShapeMismatchError, match='length 3'):
        layer.output([1.0, 1.0])


def test_wrong_weight_length_rejected_at_construction():
    with pytest.raises(ShapeMismatchError, match='needs 6 weights'):
        Layer_FullyConnected(2, Layer_Input(2), weights=[1, 2, 3, 4])


def test_wrong_weight_length_rejected_on_assignment():
    layer = Layer_FullyConnected(2, Layer_Input(2))
    with pytest.raises(ShapeMismatchError):
        layer.weights = [1, 2, 3, 4, 5, 6, 7]
    with pytest.raises(ShapeMismatchError):
        layer.weights = np.zeros((3, 2))
    # still the old weights
    assert layer.weights.shape == (6,)


def test_weights_can_be_mutated_in_place():
    layer = Layer_FullyConnected(1, Layer_Input(1), provides_bias=False,
                                 activation='linear')
    layer.weights[0] = 2.0
    layer.weights[1] = -1.0
    assert layer.output([3.0, 1.0]).tolist() == [5.0]


def test_trace_logs_every_neuron(caplog):
    import logging

    logger = logging.getLogger('neuralnet.test')
    layer = Layer_FullyConnected(2, Layer_Input(2), logger=logger)
    with caplog.at_level(logging.DEBUG, logger='neuralnet.test'):
        layer.output([1.0, 0.0, 1.0])
    messages = [record.getMessage() for record in caplog.records]
    assert any('Neuron 0' in message for message in messages)
    assert any('Neuron 1' in message for message in messages)
    assert any('Sum: 0.0, activation: 0.5' in message for message in messages)


def test_no_trace_without_logger(caplog):
    import logging

    layer = Layer_FullyConnected(2, Layer_Input(2))
    with caplog.at_level(logging.DEBUG):
        layer.output([1.0, 0.0, 1.0])
    assert not caplog.records
