import numbers

import numpy as np

from .activations import get_activation
from .errors import ShapeMismatchError, TopologyError


def _check_neuron_count(n_neurons):
    if isinstance(n_neurons, bool) or not isinstance(n_neurons, numbers.Integral):
        raise TopologyError(f'Neuron count must be an integer, got {n_neurons!r}')
    if n_neurons <= 0:
        raise TopologyError(f'Neuron count must be positive, got {n_neurons}')
    return int(n_neurons)


def _as_vector(inputs, expected, layer):
    inputs = np.asarray(inputs, dtype=np.float64)
    if inputs.ndim != 1 or inputs.shape[0] != expected:
        raise ShapeMismatchError(
            f'{layer} expects an input vector of length {expected}, '
            f'got shape {inputs.shape}')
    return inputs


class Layer_Input:

    def __init__(self, n_neurons, provides_bias=True):
        self.neuron_count = _check_neuron_count(n_neurons)
        self.provides_bias = provides_bias

        # not used by the forward pass, only kept so every layer has weights
        self.weights = np.zeros(self.neuron_count)

    @property
    def output_width(self):
        return self.neuron_count + (1 if self.provides_bias else 0)

    # forward pass
    def output(self, inputs):
        inputs = _as_vector(inputs, self.neuron_count, 'Input layer')

        # pass the values through and add the bias unit
        if self.provides_bias:
            return np.append(inputs, 1.0)
        return inputs

    def __repr__(self):
        return f'Layer_Input({self.neuron_count}, provides_bias={self.provides_bias})'


class Layer_FullyConnected:

    def __init__(self, n_neurons, previous, weights=None, provides_bias=True,
                 activation=None, logger=None):
        self.neuron_count = _check_neuron_count(n_neurons)
        self.provides_bias = provides_bias
        self.activation = get_activation(activation)
        self.logger = logger

        # the previous layer is only needed to know how wide our input is
        self.n_inputs = previous.output_width

        # initialize all weights to 0.0
        if weights is None:
            weights = np.zeros(self.n_inputs * self.neuron_count)
        self.weights = weights

    # weights applied to the output values of the previous layer
    # the connection between input k and neuron n of this layer
    # has weight at index n + k * neuron_count
    @property
    def weights(self):
        return self._weights

    @weights.setter
    def weights(self, weights):
        self._weights = self.check_weights(weights)

    def check_weights(self, weights):
        weights = np.asarray(weights, dtype=np.float64)
        expected = self.n_inputs * self.neuron_count
        if weights.ndim != 1 or weights.shape[0] != expected:
            raise ShapeMismatchError(
                f'{self!r} needs {expected} weights '
                f'({self.n_inputs} inputs x {self.neuron_count} neurons), '
                f'got shape {weights.shape}')
        return weights

    @property
    def output_width(self):
        return self.neuron_count + (1 if self.provides_bias else 0)

    # forward pass
    def output(self, inputs):
        inputs = _as_vector(inputs, self.n_inputs, repr(self))

        # the flat layout is a (n_inputs, n_neurons) matrix stored row by row,
        # so weights[n::neuron_count] are the weights of neuron n
        sums = np.dot(inputs, self._weights.reshape(self.n_inputs, self.neuron_count))
        output = np.asarray(self.activation.activate(sums), dtype=np.float64)

        if self.logger is not None:
            self._trace(inputs, sums, output)

        # add the bias unit for the next layer
        if self.provides_bias:
            return np.append(output, 1.0)
        return output

    def _trace(self, inputs, sums, output):
        self.logger.debug('\t\tInput: %s', inputs.tolist())
        for n in range(self.neuron_count):
            self.logger.debug('\t\tNeuron %d', n)
            self.logger.debug('\t\t\tWeights: %s',
                              self._weights[n::self.neuron_count].tolist())
            self.logger.debug('\t\t\tSum: %s, activation: %s', sums[n], output[n])

    def __repr__(self):
        return (f'Layer_FullyConnected({self.neuron_count}, n_inputs={self.n_inputs}, '
                f'provides_bias={self.provides_bias}, '
                f'activation={type(self.activation).__name__})')
