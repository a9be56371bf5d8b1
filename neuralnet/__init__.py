from .activations import (ACTIVATIONS, Activation_Linear, Activation_ReLU,
                          Activation_Sigmoid, get_activation)
from .errors import NeuralNetError, ShapeMismatchError, TopologyError
from .layers import Layer_FullyConnected, Layer_Input
from .network import NeuralNet

__all__ = [
    'ACTIVATIONS',
    'Activation_Linear',
    'Activation_ReLU',
    'Activation_Sigmoid',
    'get_activation',
    'NeuralNetError',
    'ShapeMismatchError',
    'TopologyError',
    'Layer_FullyConnected',
    'Layer_Input',
    'NeuralNet',
]
