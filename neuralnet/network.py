from collections.abc import Iterable

import numpy as np

from .errors import TopologyError
from .layers import Layer_FullyConnected, Layer_Input


class NeuralNet:

    def __init__(self, input_neuron_count, hidden_neuron_counts, output_neuron_count,
                 activation=None, logger=None):
        self.logger = logger
        self.layers = []

        # hidden counts must be a list of counts, not a single number
        if isinstance(hidden_neuron_counts, (str, bytes)) or \
                not isinstance(hidden_neuron_counts, Iterable):
            raise TopologyError(
                f'hidden_neuron_counts must be a sequence of neuron counts, '
                f'got {hidden_neuron_counts!r}')

        # input layer
        prev = Layer_Input(input_neuron_count, provides_bias=True)
        self.layers.append(prev)

        # hidden layers, each sized against the layer before it
        for count in hidden_neuron_counts:
            prev = Layer_FullyConnected(count, prev, provides_bias=True,
                                        activation=activation, logger=logger)
            self.layers.append(prev)

        # output layer - no bias unit, nothing comes after it
        self.layers.append(Layer_FullyConnected(output_neuron_count, prev,
                                                provides_bias=False,
                                                activation=activation,
                                                logger=logger))

    @property
    def topology(self):
        return [layer.neuron_count for layer in self.layers]

    @property
    def weighted_layers(self):
        # every layer after the input layer has weights that matter
        return self.layers[1:]

    def infer(self, inputs):
        return self.infer_with_intermediates(inputs)[-1]

    # forward pass keeping the output of every layer
    def infer_with_intermediates(self, inputs):
        output = [np.asarray(inputs, dtype=np.float64)]
        if self.logger is not None:
            self.logger.debug('Inferring %s', output[0].tolist())

        # call output method of every layer in a chain
        # pass output of the previous layer as a parameter
        for i, layer in enumerate(self.layers):
            if self.logger is not None:
                self.logger.debug('\tLayer %d', i)
            output.append(layer.output(output[-1]))

        return output

    # turn the output activations into predictions
    def predict(self, inputs):
        return self.layers[-1].activation.predictions(self.infer(inputs))

    # retrieves the weights of every layer after the input layer
    # the input layer has no weights, so index i of the list belongs to layers[i + 1]
    def get_parameters(self):
        return [layer.weights.copy() for layer in self.weighted_layers]

    # updates the layers with new weights, in layer order
    def set_parameters(self, parameters):
        parameters = list(parameters)
        layers = self.weighted_layers
        if len(parameters) != len(layers):
            raise TopologyError(
                f'Expected weights for {len(layers)} layers, got {len(parameters)}')

        # validate all of them before touching any layer
        weights = [layer.check_weights(layer_weights)
                   for layer, layer_weights in zip(layers, parameters)]

        # copy so the net owns its weights, not the caller
        for layer, layer_weights in zip(layers, weights):
            layer.weights = layer_weights.copy()

    def __repr__(self):
        return f'NeuralNet(topology={self.topology})'
