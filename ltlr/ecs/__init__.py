"""Entity-component world, components, update systems and builders for the simpler entities."""