from neuralnet.xor import XOR_INPUTS, create_xor_net

# create the net with the 'magic' weights & biases
net = create_xor_net()
print(net)

# output layer activation turns the output into a 0/1 prediction
activation = net.layers[-1].activation

# infer all four combinations
for inputs in XOR_INPUTS:
    output = net.infer(inputs)
    prediction = activation.predictions(output)
    print(f'{inputs} -> {output[0]:.6f} (prediction: {prediction[0]})')
